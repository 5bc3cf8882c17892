from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

ping_router = APIRouter()

@ping_router.get('/ping', response_class=PlainTextResponse)
async def ping():
    return 'pong'

async def king_handler():
    return 'kong'

# same as ping, with the handler declared apart from its route
ping_router.add_api_route('/king', king_handler, methods=['GET'],
                          response_class=PlainTextResponse)
