import asyncio
import logging

from dotenv import load_dotenv

from kodik import Client, ListQuery, ReleaseType, SearchQuery, get_settings

load_dotenv()


async def main():
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    async with Client.from_settings(settings) as client:
        search = await SearchQuery(title="Cyberpunk: Edgerunners", limit=1).execute(
            client
        )
        print(search)

        query = ListQuery().where(
            limit=100, types=[ReleaseType.ANIME, ReleaseType.ANIME_SERIAL]
        )
        pages = 0
        async for page in query.stream(client):
            print(f"total={page.total} results={len(page.results)}")
            pages += 1
            if pages == 2:
                break


if __name__ == "__main__":
    asyncio.run(main())
