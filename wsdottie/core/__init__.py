"""Date parsing, normalization, URL building and the fetch pipeline."""
