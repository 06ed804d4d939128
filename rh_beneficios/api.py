# rh_beneficios/api.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rh_beneficios import __version__
from rh_beneficios.beneficios.router import router as beneficios_router
from rh_beneficios.calendario.router import router as calendario_router
from rh_beneficios.config import settings

app = FastAPI(title=settings.APP_NAME, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calendario_router)
app.include_router(beneficios_router)


@app.get("/health")
def health_check():
    return {"app": settings.APP_NAME, "status": "ok"}
