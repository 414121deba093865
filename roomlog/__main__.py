"""Entry point for running RoomLog via `python -m roomlog` or the `roomlog` script."""

import uvicorn

from roomlog import create_app, get_roomlog_config


def main() -> None:
    config = get_roomlog_config()

    print(f"Starting RoomLog service at {config.URL}...")
    print("Press Ctrl+C to stop.")

    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
