"""Display-side helpers: number formatting, value animation and chart ownership."""
