import os
from dotenv import load_dotenv

print("=== System Environment ===")
print(f"BACKEND_URL from os.environ: {'definido' if os.environ.get('BACKEND_URL') else 'ausente'}")

print("\n=== After loading .env ===")
load_dotenv(override=True)
print(f"BACKEND_URL after dotenv: {'definido' if os.environ.get('BACKEND_URL') else 'ausente'}")
print(f"BACKEND_ANON_KEY after dotenv: {'definida' if os.environ.get('BACKEND_ANON_KEY') else 'ausente'}")

print("\n=== Credenciais resolvidas ===")
from app.core.config import ConfigurationError, Settings, resolve_backend_credentials
s = Settings()
print(f"Settings.BACKEND_CREDENTIALS_FILE: {s.BACKEND_CREDENTIALS_FILE}")
try:
    credentials = resolve_backend_credentials(app_settings=s)
    print(f"Origem: {credentials.source}")
    print(f"URL: {credentials.url}")
except ConfigurationError as e:
    print(f"Não configurado: {e.message}")
