# scripts/seed.py
from __future__ import annotations

import datetime as dt
import os

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from cadastro_alunos.core.logging import configure_logging, get_logger
from cadastro_alunos.db import SessionLocal
from cadastro_alunos.models.aluno import Aluno, Pessoa
from cadastro_alunos.repositories.alunos import SqlAlchemyAlunoRepository
from cadastro_alunos.services.cadastrar_aluno import CadastrarAluno
from cadastro_alunos.utils.nomes import dividir_nome

# ---------------- Configuráveis por ENV ----------------
SEED_DIAS_ATRAS = int(os.getenv("SEED_DIAS_ATRAS", "30"))

# ---------------- Dados de Exemplo ----------------
# (nome completo, apelido, matéria preferida)
ALUNOS_DATA = [
    ("Ada Lovelace", "ada", "Matemática"),
    ("Alan Turing", "turing", "Computação"),
    ("Grace Hopper", "grace", "Computação"),
    ("Clara Dias", None, "Biologia"),
    ("Maria da Silva", "mari", "História"),
]


def _ja_existe(db: Session, primeiro: str, sobrenome: str, materia: str) -> bool:
    # sem apelido, identifica o aluno por nome + matéria
    c = Aluno.__table__.c
    stmt = select(Aluno.registro).where(
        c.primeiro_nome == primeiro,
        c.sobrenome == sobrenome,
        c.materia_preferida == materia,
        c.apelido.is_(None),
    )
    return db.scalars(stmt).first() is not None


def seed(session_factory: sessionmaker = SessionLocal) -> int:
    log = get_logger()
    criados = 0
    hoje = dt.date.today()
    with session_factory() as db:
        repo = SqlAlchemyAlunoRepository(db)
        cadastrar = CadastrarAluno(repo)
        for i, (nome, apelido, materia) in enumerate(ALUNOS_DATA):
            primeiro, sobrenome = dividir_nome(nome)
            if apelido is not None:
                existe = repo.find_by_apelido(apelido) is not None
            else:
                existe = _ja_existe(db, primeiro, sobrenome, materia)
            if existe:
                log.info("seed.skip", nome=nome)
                continue
            cadastrar.executa(
                Aluno(
                    pessoa=Pessoa(primeiro_nome=primeiro, sobrenome=sobrenome),
                    # espalha as matrículas para a busca por data ter o que filtrar
                    data_da_matricula=hoje - dt.timedelta(days=SEED_DIAS_ATRAS - i * 7),
                    materia_preferida=materia,
                    apelido=apelido,
                )
            )
            criados += 1
    log.info("seed.done", criados=criados)
    return criados


if __name__ == "__main__":
    configure_logging(json=False)
    seed()
