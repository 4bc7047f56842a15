"""ESC/POS protocol layer: raw command builders."""
