import argparse

import uvicorn

from media_relay.config.settings import config


def main():
    parser = argparse.ArgumentParser(description="Media relay server")
    parser.add_argument('--host', default=config.server.host,
                        help=f'Bind address (default: {config.server.host})')
    parser.add_argument('-p', '--port', type=int, default=config.server.port,
                        help=f'Port to run on (default: {config.server.port})')
    parser.add_argument('--reload', action='store_true', help='Reload on code changes')
    args = parser.parse_args()

    uvicorn.run("media_relay.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
