import asyncio
import logging
import os
import sys

from app import connect_store, create_container


async def main(collection: str, batch_size: int | None) -> int:
    repo = connect_store(create_container())

    result = await repo.erase_collection(collection, batch_size)
    if not result:
        print(f'Failed to erase collection {collection}: {result.cause}')
        return 1

    print(f'Deleted {result.value.deleted} documents from {collection} in {result.value.batches} batches')  # type: ignore[union-attr]
    return 0


if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        print(f'Usage: {sys.argv[0]} COLLECTION [BATCH_SIZE]')
        sys.exit(2)

    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))
    sys.exit(asyncio.run(main(sys.argv[1], int(sys.argv[2]) if len(sys.argv) == 3 else None)))
