"""
Scraper Service package.

The scraper turns upstream HTML pages into structured JSON. Scraping is
expensive, so results are kept in a Redis cache in front of it:

- app.cache: Store client, cache-aside lookups, TTL policy and key builder.
- app.bootstrap: Startup wiring that decides whether caching is enabled.

Guidelines:
- The cache is optional; a missing or broken cache must never fail a request.
- Set up the store once, before serving traffic, and inject it where needed.
"""
