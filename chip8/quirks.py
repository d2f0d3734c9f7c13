"""
Switches for the instructions whose behaviour differs between interpreters.

The defaults follow what most modern programs expect. COSMAC_VIP reproduces
the original 1977 interpreter.
"""
from collections import namedtuple

Quirks = namedtuple("Quirks", [
    "load_store_increments_index",  # Fx55/Fx65 leave I at I + x + 1
    "jump_uses_vx",                 # Bnnn adds VX (X = high nibble of nnn) instead of V0
    "wrap_sprites",                 # sprite pixels past an edge wrap around instead of being clipped
    "shift_uses_vy",                # 8xy6/8xyE shift VY into VX instead of shifting VX in place
    "logic_resets_vf",              # 8xy1/8xy2/8xy3 clear VF
    "index_overflow_flag",          # Fx1E sets VF when I leaves the address space
], defaults=[False, False, True, False, False, False])

MODERN = Quirks()

COSMAC_VIP = Quirks(
    load_store_increments_index=True,
    wrap_sprites=False,
    shift_uses_vy=True,
    logic_resets_vf=True,
)
