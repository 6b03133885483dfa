"""
module ghosttext.surface.backends

Contains all concrete surface backend implementations built on top of
third-party editing libraries
"""
