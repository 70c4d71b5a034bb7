"""Configuração do processo: logging estruturado e settings por domínio."""
