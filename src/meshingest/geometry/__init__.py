"""
Geometry kernels: bounding-box normalization and per-triangle normals.
Pure NumPy, no file-format knowledge.
"""
