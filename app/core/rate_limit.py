"""
Controle Fotógrafo - Rate Limiting
Limiter compartilhado (slowapi) aplicado nas rotas de login
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
