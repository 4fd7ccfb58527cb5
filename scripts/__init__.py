"""Developer scripts for seller sales metrics."""
