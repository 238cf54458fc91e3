from __future__ import annotations

import dataclasses
import datetime as dt
import secrets
import uuid

from sqlalchemy.exc import IntegrityError

from cadastro_alunos.core.logging import get_logger
from cadastro_alunos.models.aluno import Aluno
from cadastro_alunos.repositories.alunos import AlunoRepository


class ApelidoEmUso(ValueError):
    pass


def gerar_documento() -> str:
    # 11 dígitos, mesmo tamanho de um CPF sem máscara
    return "".join(secrets.choice("0123456789") for _ in range(11))


class CadastrarAluno:
    """
    Caso de uso de matrícula: completa registro, documento e data da matrícula
    quando ausentes e grava pelo repositório.
    """

    def __init__(self, repository: AlunoRepository):
        self.repository = repository

    def executa(self, aluno: Aluno) -> Aluno:
        if aluno.apelido is not None:
            existente = self.repository.find_by_apelido(aluno.apelido)
            if existente is not None and existente.registro != aluno.registro:
                raise ApelidoEmUso(f"Apelido '{aluno.apelido}' já está em uso.")

        if not aluno.registro:
            aluno.registro = str(uuid.uuid4())
        if not aluno.pessoa.documento:
            # composite não rastreia mutação in-place; troca o objeto inteiro
            aluno.pessoa = dataclasses.replace(aluno.pessoa, documento=gerar_documento())
        if aluno.data_da_matricula is None:
            aluno.data_da_matricula = dt.date.today()

        apelido = aluno.apelido
        try:
            salvo = self.repository.save(aluno)
        except IntegrityError as exc:
            # outro request gravou o mesmo apelido entre a checagem e o insert
            if apelido is None:
                raise
            raise ApelidoEmUso(f"Apelido '{apelido}' já está em uso.") from exc

        get_logger().info(
            "aluno.cadastrado",
            registro=salvo.registro,
            data_da_matricula=salvo.data_da_matricula.isoformat(),
        )
        return salvo
