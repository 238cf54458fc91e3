from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from cadastro_alunos.db.base_class import Base
from cadastro_alunos.utils.nomes import PRIMEIRO_NOME_MAX, SOBRENOME_MAX


@dataclass
class Pessoa:
    """Dados pessoais embutidos no aluno (sem tabela própria)."""

    primeiro_nome: str
    sobrenome: str
    documento: str | None = None


class Aluno(Base):
    __tablename__ = "alunos"

    registro: Mapped[str] = mapped_column(String(36), primary_key=True)
    pessoa: Mapped[Pessoa] = composite(
        mapped_column("primeiro_nome", String(PRIMEIRO_NOME_MAX), nullable=False),
        mapped_column("sobrenome", String(SOBRENOME_MAX), nullable=False),
        mapped_column("documento", String(20), nullable=False),
    )
    data_da_matricula: Mapped[dt.date] = mapped_column(
        Date, index=True, nullable=False
    )
    materia_preferida: Mapped[str | None] = mapped_column(
        String(80), index=True, nullable=True
    )
    apelido: Mapped[str | None] = mapped_column(
        String(60), index=True, unique=True, nullable=True
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        onupdate=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )
