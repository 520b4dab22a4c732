# diarias/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Configurações do Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")
DIARIAS_TABLE = os.getenv("DIARIAS_TABLE", "diarias")

# Saldo mensal disponível para diárias (R$)
SALDO_MENSAL = float(os.getenv("SALDO_MENSAL", "60000"))

# Configurações da página
FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "diarias-dev")
TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
