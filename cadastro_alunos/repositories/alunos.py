"""
Acesso a dados de alunos.

`AlunoRepository` é a porta usada pelas rotas e serviços; a implementação
SQLAlchemy é só um adaptador e pode ser trocada sem tocar nos handlers.
"""

from __future__ import annotations

import datetime as dt
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cadastro_alunos.models.aluno import Aluno


class AlunoRepository(Protocol):
    def find_by_id(self, registro: str) -> Aluno | None: ...

    def find_by_apelido(self, apelido: str) -> Aluno | None: ...

    def find_all_by_materia_preferida(self, materia_preferida: str) -> list[Aluno]: ...

    def find_all_by_materia_preferida_and_apelido(
        self, materia_preferida: str, apelido: str | None
    ) -> list[Aluno]: ...

    def find_all_by_data_da_matricula_after(
        self, data_da_matricula: dt.date
    ) -> list[Aluno]: ...

    def save(self, aluno: Aluno) -> Aluno: ...


class SqlAlchemyAlunoRepository:
    """Implementação de `AlunoRepository` sobre uma Session SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, registro: str) -> Aluno | None:
        return self.session.get(Aluno, registro)

    def find_by_apelido(self, apelido: str) -> Aluno | None:
        stmt = select(Aluno).where(Aluno.apelido == apelido)
        return self.session.scalars(stmt).first()

    def find_all_by_materia_preferida(self, materia_preferida: str) -> list[Aluno]:
        stmt = (
            select(Aluno)
            .where(Aluno.materia_preferida == materia_preferida)
            .order_by(Aluno.registro)
        )
        return list(self.session.scalars(stmt).all())

    def find_all_by_materia_preferida_and_apelido(
        self, materia_preferida: str, apelido: str | None
    ) -> list[Aluno]:
        # apelido ausente casa com alunos sem apelido (IS NULL)
        filtro_apelido = (
            Aluno.apelido.is_(None) if apelido is None else Aluno.apelido == apelido
        )
        stmt = (
            select(Aluno)
            .where(Aluno.materia_preferida == materia_preferida, filtro_apelido)
            .order_by(Aluno.registro)
        )
        return list(self.session.scalars(stmt).all())

    def find_all_by_data_da_matricula_after(
        self, data_da_matricula: dt.date
    ) -> list[Aluno]:
        stmt = (
            select(Aluno)
            .where(Aluno.data_da_matricula > data_da_matricula)
            .order_by(Aluno.registro)
        )
        return list(self.session.scalars(stmt).all())

    def save(self, aluno: Aluno) -> Aluno:
        """Persiste o aluno e devolve a instância gerenciada."""
        self.session.add(aluno)
        try:
            self.session.commit()
        except IntegrityError:
            # deixa a sessão utilizável para o próximo request
            self.session.rollback()
            raise
        self.session.refresh(aluno)
        return aluno
