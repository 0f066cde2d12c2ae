"""Cursor-following pagination over Kodik's ``next_page`` links."""

import logging
from typing import AsyncGenerator, Sequence, Tuple, Type, TypeVar

from kodik.core.client import Client
from kodik.models.responses import ReleasePage

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=ReleasePage)


async def paginate(
    client: Client,
    endpoint: str,
    params: Sequence[Tuple[str, str]],
    response_model: Type[P],
) -> AsyncGenerator[P, None]:
    """Yield pages of ``endpoint`` one at a time, in server order.

    The first request goes to ``endpoint`` with ``params``. Every following
    request goes to the literal ``next_page`` URL of the previous page, with
    only the token attached. Nothing is fetched until the consumer asks for
    the next page, so abandoning the iterator stops the requests.

    Args:
        client: Transport used for every request.
        endpoint: API path of the first request, e.g. ``/list``.
        params: Serialized query parameters for the first request.
        response_model: Page model each response is decoded into.

    Raises:
        KodikApiError: Kodik answered a page with an error payload. Pages
            yielded before it stay valid.
        HttpError: A request could not be completed.
        MalformedResponseError: A response fits neither envelope shape.
    """
    request = client.build_request(endpoint, params)
    page_number = 1

    while True:
        page = await client.fetch(request, response_model)
        logger.debug(
            "Fetched page %d of %s (%d results, total %d)",
            page_number,
            endpoint,
            len(page.results),
            page.total,
        )
        yield page

        if not page.next_page:
            return

        request = client.build_request(page.next_page)
        page_number += 1
