from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cadastro_alunos.utils.nomes import violacoes_nome_completo


class AlunoPostRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome_completo: str = Field(..., alias="nomeCompleto", max_length=255)
    documento: str | None = Field(None, min_length=1, max_length=20)
    apelido: str | None = Field(None, min_length=1, max_length=60)
    materia_preferida: str | None = Field(
        None, alias="materiaPreferida", min_length=1, max_length=80
    )

    @field_validator("nome_completo")
    @classmethod
    def _nome_completo_valido(cls, v: str) -> str:
        violacoes = violacoes_nome_completo(v)
        if violacoes:
            raise ValueError("; ".join(violacoes))
        return v

    @field_validator("documento", "apelido", "materia_preferida")
    @classmethod
    def _opcionais_sem_branco(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("não pode estar em branco")
        return v


class AlunoPatchNome(BaseModel):
    newName: str = Field(..., min_length=1, max_length=200)

    @field_validator("newName")
    @classmethod
    def _nao_em_branco(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("newName não pode estar em branco")
        return v


class AlunoResponse(BaseModel):
    primeiroNome: str
    sobrenome: str
    documento: str
    registro: str


class PessoaOut(BaseModel):
    primeiroNome: str | None = None
    sobrenome: str | None = None
    documento: str | None = None


class AlunoOut(BaseModel):
    """Representação completa do aluno; todos os campos vazios por padrão."""

    registro: str | None = None
    pessoa: PessoaOut | None = None
    dataDaMatricula: dt.date | None = None
    materiaPreferida: str | None = None
    apelido: str | None = None
