import asyncio
import socket
import sys

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn import Config, Server

HOST = "0.0.0.0"
PORT = 8080
BACKLOG = 100
LOG_LEVEL = "warning"

HELLO_BODY = b"<html><body><h1>Hello World!</h1></body></html>"

HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH"]


class BindError(OSError):
    """The listening socket could not be bound to the requested address."""

    def __init__(self, host, port, cause):
        super().__init__(cause.errno, cause.strerror)
        self.host = host
        self.port = port

    def __str__(self):
        return f"cannot bind {self.host}:{self.port}: {self.strerror}"


# FastAPI Application
app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

@app.api_route("/{path:path}", methods=HTTP_METHODS)
async def hello(path: str):
    # No media type: Content-Type is left to the client.
    return Response(content=HELLO_BODY)

# Extension methods (PROPFIND, MKCOL, ...) miss the route above; answer them the same way.
@app.exception_handler(405)
async def hello_any_method(request: Request, exc: StarletteHTTPException):
    return Response(content=HELLO_BODY)


def bind_socket(host=HOST, port=PORT):
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except OSError as e:
        sock.close()
        raise BindError(host, port, e) from e
    return sock

def build_server(log_level=LOG_LEVEL):
    config = Config(app, log_level=log_level, access_log=False)
    return Server(config)

async def main(host=HOST, port=PORT):
    sock = bind_socket(host, port)
    bound_port = sock.getsockname()[1]
    print(f"Hello World HTTP Server running on port {bound_port}")

    server = build_server()
    await server.serve(sockets=[sock])

def run():
    try:
        asyncio.run(main())
    except BindError as e:
        print(f"Failed to start server: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    run()
