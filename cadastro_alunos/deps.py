from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from cadastro_alunos.db import get_db
from cadastro_alunos.repositories.alunos import AlunoRepository, SqlAlchemyAlunoRepository
from cadastro_alunos.services.cadastrar_aluno import CadastrarAluno


def get_aluno_repository(db: Session = Depends(get_db)) -> AlunoRepository:  # noqa: B008
    return SqlAlchemyAlunoRepository(db)


def get_cadastrar_aluno(
    repository: AlunoRepository = Depends(get_aluno_repository),  # noqa: B008
) -> CadastrarAluno:
    return CadastrarAluno(repository)
