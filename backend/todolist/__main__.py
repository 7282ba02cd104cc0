"""Run the To-Do List API server: `python -m todolist`."""

import uvicorn

from todolist.config import settings


def main() -> None:
    uvicorn.run(
        "todolist.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
