"""Core building blocks shared by all neo-cache features."""
