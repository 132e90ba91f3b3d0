"""Desktop entry points for synthsun."""
