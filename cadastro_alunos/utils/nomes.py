from __future__ import annotations

# mesmos tamanhos das colunas primeiro_nome / sobrenome
PRIMEIRO_NOME_MAX = 80
SOBRENOME_MAX = 120


def violacoes_nome_completo(nome: str | None) -> list[str]:
    """Lista as violações do nome completo; vazia quando o nome é válido."""
    if nome is None or not nome.strip():
        return ["nomeCompleto não pode estar em branco"]
    partes = nome.split()
    if len(partes) < 2:
        return ["nomeCompleto deve conter nome e sobrenome"]

    violacoes = []
    if len(partes[0]) > PRIMEIRO_NOME_MAX:
        violacoes.append(f"primeiro nome excede {PRIMEIRO_NOME_MAX} caracteres")
    if len(" ".join(partes[1:])) > SOBRENOME_MAX:
        violacoes.append(f"sobrenome excede {SOBRENOME_MAX} caracteres")
    return violacoes


def dividir_nome(nome_completo: str) -> tuple[str, str]:
    """
    "Ada Lovelace" -> ("Ada", "Lovelace").
    Nomes compostos mantêm o restante no sobrenome: "Maria da Silva" -> ("Maria", "da Silva").
    """
    partes = nome_completo.split()
    if len(partes) < 2:
        raise ValueError("Nome completo precisa de nome e sobrenome.")
    return partes[0], " ".join(partes[1:])
