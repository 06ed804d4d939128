class ErroDeConfiguracao(ValueError):
    """Cadastro inconsistente que impede o cálculo do mês inteiro
    (ex.: funcionário ativo apontando para um setor inexistente)."""


class ErroDeValidacao(ValueError):
    """Registro de entrada com formato inválido."""
