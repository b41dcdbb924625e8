"""Surface assembly: turns parsed regions into boundary-taggable surfaces."""
