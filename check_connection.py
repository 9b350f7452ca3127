"""
Test MongoDB Connection
Simple script to verify the maintenance scripts can reach the gallery database
"""

import asyncio
import re
import sys
from pymongo.errors import PyMongoError

from config import settings
from database import open_database

def mask_credentials(url: str) -> str:
    """Hide the user:password part of a connection string"""
    return re.sub(r"//[^/@]+@", "//***:***@", url)

async def check_connection():
    """Test MongoDB connection and list the collections the scripts use"""

    print("🔗 Testing MongoDB Connection...")
    print(f"Database: {settings.db_name}")
    print(f"Connection URL: {mask_credentials(settings.mongo_url)}")

    try:
        print("\n📡 Attempting to connect...")
        async with open_database() as db:
            print("✅ MongoDB connection successful!")

            collections = await db.list_collection_names()
            print(f"   Collections found: {len(collections)}")

            for name in (settings.carts_collection, settings.users_collection,
                         settings.orders_collection, settings.products_collection):
                count = await db[name].count_documents({}) if name in collections else 0
                print(f"   {name}: {count} documents")

        return True

    except PyMongoError as e:
        print(f"❌ Connection failed: {str(e)}")
        print(f"\n🔧 Troubleshooting tips:")
        print(f"   1. Check MONGO_URL in your .env file")
        print(f"   2. Make sure your IP address is whitelisted")
        print(f"   3. Verify your username/password are correct")

        return False

if __name__ == "__main__":
    success = asyncio.run(check_connection())
    sys.exit(0 if success else 1)
