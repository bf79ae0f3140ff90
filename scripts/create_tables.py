import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import asyncio

from coinapp.config.settings import get_settings
from coinapp.db.session import create_tables


async def main():
    await create_tables()
    print(f"✅ favorites table created/verified | db={get_settings().DATABASE_URL}")


if __name__ == "__main__":
    asyncio.run(main())
