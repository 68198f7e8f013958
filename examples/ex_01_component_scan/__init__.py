"""Component scanning quickstart.

Run with ``python -m examples.ex_01_component_scan.main``.
"""
