"""
Console front end: `python -m todolist.client`.

Commands:
    add <text>   add a task
    del <id>     delete a task
    ls           show the list
    quit         exit (waits for requests still in flight)

Add and delete run as background tasks, so the prompt comes back while
the request is in flight.
"""

import asyncio
import logging
import sys
from typing import Set

from todolist.client.api import TaskApiClient
from todolist.client.view import TaskListView
from todolist.config import settings

logger = logging.getLogger(__name__)

HELP = "commands: add <text> | del <id> | ls | quit"


async def run() -> None:
    in_flight: Set[asyncio.Task] = set()

    def spawn(coro) -> None:
        job = asyncio.create_task(coro)
        in_flight.add(job)
        job.add_done_callback(in_flight.discard)

    async with TaskApiClient() as api:
        view = TaskListView(api)
        await view.mount()
        print(view.render())
        print(HELP)

        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            command, _, argument = line.strip().partition(" ")

            if command == "add":
                view.set_pending_text(argument)
                spawn(view.add_task())
            elif command == "del" and argument:
                spawn(view.delete_task(argument.strip()))
            elif command == "ls":
                print(view.render())
            elif command == "quit":
                break
            elif command:
                print(HELP)

        if in_flight:
            await asyncio.gather(*in_flight)
        print(view.render())


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    asyncio.run(run())


if __name__ == "__main__":
    main()
