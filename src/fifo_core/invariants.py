"""
src/fifo_core/invariants.py
Constantes de configuración de la librería.
"""

# =============================================================================
# REPRESENTACIÓN TEXTUAL (Solo diagnóstico / logs)
# =============================================================================

# Máximo de elementos que imprime ConsList antes de truncar con "..."
REPR_LIMIT = 10

# Prefijos de display: Queue<[1, 2, 3]> / FIFO<[1, 2, 3]>
QUEUE_DISPLAY_NAME = "Queue"
FIFO_DISPLAY_NAME  = "FIFO"
