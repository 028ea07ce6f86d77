from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infohub.core.config_app import settings
from infohub.core.exceptions import setup_exception_handlers
from infohub.core.lifespan import lifespan
from infohub.currency.routes import convert_router
from infohub.quotes.routes import quote_router
from infohub.weather.routes import weather_router


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Погода
app.include_router(weather_router, prefix="/api/weather", tags=["Weather"])

# Валюты
app.include_router(convert_router, prefix="/api/convert", tags=["Currency"])

# Цитаты
app.include_router(quote_router, prefix="/api/quote", tags=["Quotes"])


@app.get("/api/health", tags=["Health"])
async def health_check():
    """Проверка здоровья приложения."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        workers=1,
        log_level="info"
    )
