# Garante o registro de TODAS as models no mesmo registry
from cadastro_alunos.db.base_class import Base  # noqa

# IMPORTS com efeito colateral (não remova)
from cadastro_alunos.models.aluno import Aluno  # noqa
