# cadastro_alunos/api/routes/alunos.py
import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from cadastro_alunos.core.logging import get_logger
from cadastro_alunos.deps import get_aluno_repository, get_cadastrar_aluno
from cadastro_alunos.models.aluno import Aluno, Pessoa
from cadastro_alunos.repositories.alunos import AlunoRepository
from cadastro_alunos.schemas.alunos import (
    AlunoOut,
    AlunoPatchNome,
    AlunoPostRequest,
    AlunoResponse,
)
from cadastro_alunos.services.cadastrar_aluno import ApelidoEmUso, CadastrarAluno
from cadastro_alunos.utils.nomes import dividir_nome

router = APIRouter(prefix="/aluno/fiap", tags=["alunos"])

Repo = Annotated[AlunoRepository, Depends(get_aluno_repository)]

# localhost:8000/aluno/fiap?sala=2tds&sala=1tds


@router.get("", response_class=PlainTextResponse)
def get_alunos(sala: list[str] | None = Query(None)):
    return "Rota para consultar sala"


@router.get("/{sala_id}/{aluno_id}/nome", response_model=AlunoOut)
def get_aluno_da_sala(sala_id: str, aluno_id: str):
    return AlunoOut()


@router.post("/{sala_id}", response_model=AlunoResponse)
def post_aluno(
    sala_id: str,
    payload: AlunoPostRequest,
    cadastrar_aluno: Annotated[CadastrarAluno, Depends(get_cadastrar_aluno)],
):
    primeiro_nome, sobrenome = dividir_nome(payload.nome_completo)

    aluno = Aluno(
        pessoa=Pessoa(
            primeiro_nome=primeiro_nome,
            sobrenome=sobrenome,
            documento=payload.documento,
        ),
        data_da_matricula=dt.date.today(),
        materia_preferida=payload.materia_preferida,
        apelido=payload.apelido,
    )
    try:
        cadastrado = cadastrar_aluno.executa(aluno)
    except ApelidoEmUso as exc:
        raise HTTPException(status.HTTP_409_CONFLICT, str(exc)) from exc

    get_logger().info("aluno.post", sala_id=sala_id, registro=cadastrado.registro)
    return AlunoResponse(
        primeiroNome=cadastrado.pessoa.primeiro_nome,
        sobrenome=cadastrado.pessoa.sobrenome,
        documento=cadastrado.pessoa.documento,
        registro=str(cadastrado.registro),
    )


@router.patch("/{aluno_id}/nome", response_model=AlunoPatchNome)
def atualiza_nome(aluno_id: str, nome: AlunoPatchNome):
    # ainda não persiste: devolve o corpo recebido
    return nome


@router.get("/apelido/{apelido}", response_class=PlainTextResponse)
def get_aluno_por_apelido(apelido: str, repository: Repo):
    aluno = repository.find_by_apelido(apelido)
    get_logger().info("aluno.consulta", por="apelido", encontrados=int(aluno is not None))
    return "Apelido"


@router.get("/materia-preferida/{materia}", response_class=PlainTextResponse)
def get_aluno_por_materia(materia: str, repository: Repo):
    alunos = repository.find_all_by_materia_preferida(materia)
    get_logger().info("aluno.consulta", por="materia_preferida", encontrados=len(alunos))
    return "Materia Preferida"


@router.get(
    "/materia-preferida-apelido/{materia}/apelido", response_class=PlainTextResponse
)
def get_aluno_por_materia_preferida_e_apelido(
    materia: str, repository: Repo, apelido: str | None = Query(None)
):
    alunos = repository.find_all_by_materia_preferida_and_apelido(materia, apelido)
    get_logger().info(
        "aluno.consulta", por="materia_preferida_apelido", encontrados=len(alunos)
    )
    return "Materia Preferida e apelido"


@router.get("/data/{data_da_matricula}", response_class=PlainTextResponse)
def get_aluno_data_da_matricula(data_da_matricula: dt.date, repository: Repo):
    alunos = repository.find_all_by_data_da_matricula_after(data_da_matricula)
    get_logger().info("aluno.consulta", por="data_da_matricula", encontrados=len(alunos))
    return "Data sugerida"


@router.get("/{aluno_id}", response_class=PlainTextResponse)
def get_aluno(aluno_id: str, repository: Repo):
    aluno = repository.find_by_id(aluno_id)
    get_logger().info("aluno.consulta", por="registro", encontrados=int(aluno is not None))
    return "Aluno Id"
