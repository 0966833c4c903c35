"""One sub-package per upstream API family."""
