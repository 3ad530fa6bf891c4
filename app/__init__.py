"""
Desktop front-end: configuration, worker thread, control window, entry point.
"""
