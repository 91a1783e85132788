"""
Server entry point
"""
import logging

import uvicorn
from config_loader import settings


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s %(levelname)s %(name)s %(message)s'
    )

    print(f"""
    ╔════════════════════════════════════════════════════════════════════╗
    ║                     {settings.API_NAME:<47}║
    ║                                                                    ║
    ║  Categories:        /api/categories                                ║
    ║  Files / search:    /api/files   /api/search                       ║
    ║                                                                    ║
    ║  Interactive docs: http://localhost:{settings.SERVER_PORT}/docs{' ' * (26 - len(str(settings.SERVER_PORT)))}║
    ╚════════════════════════════════════════════════════════════════════╝
    """)

    uvicorn.run(
        "storage_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL
    )
