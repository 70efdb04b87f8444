"""Download a catalog snapshot from the content API"""

import asyncio
import json
import os
import sys
from datetime import datetime, timezone

import aiofiles
import aiohttp

from rail_seat_guide.services.catalog_service import CatalogService
from rail_seat_guide.utils.config import get_settings


async def fetch_catalog(url: str, save_path: str) -> str:
    async with aiohttp.ClientSession() as session:
        async with session.get(url, headers={"Accept": "application/json"}) as resp:
            if resp.status != 200:
                raise RuntimeError(f"Request failed with status {resp.status}")
            data = await resp.json(content_type=None)
    async with aiofiles.open(save_path, "w", encoding="utf-8") as f:
        await f.write(json.dumps(data, ensure_ascii=False, indent=2))
    return save_path


async def sync_catalog():
    settings = get_settings()
    save_path = settings.catalog_path
    print("🚆 Catalog sync")
    print("=" * 50)
    print(f"🌐 Source: {settings.catalog_url or '(not configured)'}")
    print(f"⏰ Time: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')} (UTC)")
    print("=" * 50)
    if settings.catalog_url:
        try:
            await fetch_catalog(settings.catalog_url, save_path)
            print(f"✅ Saved snapshot to {save_path}")
        except (aiohttp.ClientError, RuntimeError, ValueError) as e:
            print(f"❌ Download failed: {e}")
            print("🔄 Validating the existing local snapshot instead...")
    if not os.path.exists(save_path):
        print(f"❌ No local snapshot at {save_path}")
        sys.exit(1)

    service = CatalogService()
    await service.load_catalog(path=save_path)
    print(f"✅ {len(service.stations)} stations, {len(service.coaches)} coaches, {len(service.trains)} trains")
    for train in service.trains[:10]:
        print(f"    - {train.name} {train.number}/{train.reverse_number or '-'} ({train.code_from_to})")


if __name__ == "__main__":
    asyncio.run(sync_catalog())
