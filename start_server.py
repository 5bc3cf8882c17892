import logging
import uvicorn
from dotenv import load_dotenv
from app.core.config import Settings

load_dotenv()

if __name__ == '__main__':
    settings = Settings()
    # uvicorn only configures its own loggers
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )
    print(f'server running on {settings.server_host}:{settings.server_port}')
    uvicorn.run(
        app='app.main:app',
        host=settings.server_host,
        port=settings.server_port,
        log_level='info'
        )
