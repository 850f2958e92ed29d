"""
Centralized constants for the math display formatter.
All engine literals and magic values live here.
"""

# ===========================================
# ENGINE SENTINELS
# ===========================================
ZERO_SENTINEL = '0'                   # engine output for a zero result
ERROR_SENTINEL = 'Error'              # engine output for a failed computation
SENTINEL_VALUES = (ZERO_SENTINEL, ERROR_SENTINEL)

# ===========================================
# RENDERING
# ===========================================
WRAP_NONE = 'none'
WRAP_INLINE = 'inline'                # $...$
WRAP_DISPLAY = 'display'              # \[...\]
WRAP_MODES = [WRAP_NONE, WRAP_INLINE, WRAP_DISPLAY]
DEFAULT_WRAP_MODE = WRAP_NONE

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = None                       # e.g. 'logs/mathfmt.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
