"""API router setup."""
from fastapi import APIRouter

from cadastro_alunos.api.routes import alunos

api_router = APIRouter()
api_router.include_router(alunos.router)
