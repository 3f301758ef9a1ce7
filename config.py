"""
Constantes de configuración de la calculadora.

Los valores marcados con ``os.getenv`` pueden sobrescribirse desde el
entorno o desde un archivo ``.env`` en el directorio de trabajo.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Mensajes de error transitorios
ERROR_TIMEOUT_MS = int(os.getenv("CALC_ERROR_TIMEOUT_MS", "3000"))

# Modo inicial: "basic" | "scientific"
START_MODE = os.getenv("CALC_START_MODE", "basic").strip().lower()

# Nivel de logging para main.py
LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "WARNING").upper()

# Formato numérico
MAX_DISPLAY_LENGTH = 12     # más caracteres → notación exponencial
EXPONENTIAL_DIGITS = 6      # dígitos fraccionarios en notación exponencial
RESULT_DECIMALS = 7         # redondeo tras operador o '='
