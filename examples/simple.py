"""Print the current ticker, buy book and trades of every market."""

import asyncio
import os

from cryptomkt import Client, CryptoMktError, OrderType
from cryptomkt.logging import configure_logging

API_KEY = os.environ.get("CRYPTOMKT_API_KEY", "<API_KEY>")
API_SECRET = os.environ.get("CRYPTOMKT_API_SECRET", "<API_SECRET>")


async def main() -> None:
    async with Client(API_KEY, API_SECRET) as client:
        markets = await client.get_markets()
        for m in markets:
            print(m.get_name())

            try:
                print(await m.get_current_ticker())

                print("------- Orders ------")
                print(await m.get_orders_book(OrderType.BUY, 0, 20))

                print("------- Trades ------")
                print(await m.get_trades("2018-05-15", "2018-05-16", 0, 20))
            except CryptoMktError as e:
                print(f"{m.get_name()}: {e}")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
