# MIT License (see LICENSE)
"""
Interactive frontends. Requires the ``app`` extra (pygame).

    from gravity_sandbox.frontend.pygame_app import main
"""
