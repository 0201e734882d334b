import asyncio
import json
import sys

from app.parsers import ParserFactory


async def scrape(url: str):
    print(f"\n--- Scraping URL: {url} ---")
    parser = ParserFactory.get_parser(url)
    print(f"Selected Parser: {parser.__class__.__name__}")

    result = await parser.extract(url)
    if not result.success:
        print(f"Extraction failed: {result.error}")
    print(json.dumps(result.data.model_dump(by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/scrape_url.py <URL> [<URL> ...]")
        sys.exit(1)

    for url in sys.argv[1:]:
        asyncio.run(scrape(url))
