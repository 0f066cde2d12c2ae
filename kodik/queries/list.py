"""``/list``: the paginated release catalog."""

from typing import AsyncGenerator, Optional

from pydantic import PositiveInt

from kodik.core.client import Client
from kodik.core.errors import KodikApiError
from kodik.models.enums import ListSort, SortOrder
from kodik.models.responses import ListResponse
from kodik.queries.base import PlaybackFilters, ReleaseFilters
from kodik.services.pagination import paginate


class ListQuery(PlaybackFilters, ReleaseFilters):
    """List releases, optionally sorted, one page at a time.

    Example:
        query = ListQuery(limit=100, types=[ReleaseType.ANIME_SERIAL])
        async for page in query.stream(client):
            print(page.total, len(page.results))
    """

    endpoint = "/list"
    response_model = ListResponse

    limit: Optional[PositiveInt] = None  # results per page, max 100
    sort: Optional[ListSort] = None
    order: Optional[SortOrder] = None

    def stream(self, client: Client) -> AsyncGenerator[ListResponse, None]:
        """Stream every page of the listing.

        The query is serialized right away, so a configuration that cannot
        be serialized fails here rather than on the first iteration.
        """
        params = self.serialize()
        return paginate(client, self.endpoint, params, self.response_model)

    async def execute(self, client: Client) -> ListResponse:
        """Fetch only the first page; the remaining pages are not requested."""
        pages = self.stream(client)
        try:
            return await anext(pages)
        except StopAsyncIteration:
            raise KodikApiError("Empty response") from None
        finally:
            await pages.aclose()
