"""Application Layer.

Screen logic sitting between the presentation and the repositories.
"""
