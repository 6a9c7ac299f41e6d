"""UI package for docui.

The panel engine (panels, focus, overlays, key dispatch) lives in plain
Python objects so it can be driven from tests. `docui.ui.app` paints it
with Textual.
"""
