"""Application composition layer for the Tkinter GUI.

``main.App`` wires views, view models, adapters, and use cases into the
runnable desktop explorer without placing adoption logic in views.
"""
