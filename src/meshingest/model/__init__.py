"""
The MODEL layer contains pure data structures.
It has NO knowledge of file formats or of visualization (PyVista).
It deals with triangle buffers, regions and surfaces.
"""
