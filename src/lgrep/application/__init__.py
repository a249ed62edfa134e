"""Application layer: services shared by user interfaces."""
