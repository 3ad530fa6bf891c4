"""
Data types shared by every layer: enums, landmark index tables and the
frame / draw-command models.
"""
