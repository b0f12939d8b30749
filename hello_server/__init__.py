from .main import HELLO_BODY, PORT, BindError, app
