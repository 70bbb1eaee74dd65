"""pixstyle: deterministic artistic stylization filters for raster images."""
