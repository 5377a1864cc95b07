"""snowscape
=================

Layered terminal scene renderer.

A scene is a stack of :class:`~snowscape.layers.base.Layer` objects (the
decorated tree, falling snow) merged front-to-back by the
:class:`~snowscape.compositor.Compositor` into one block of styled text per
tick. Run it with ``python -m snowscape``.
"""
