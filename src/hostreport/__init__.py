"""hostreport: collect local host inventory and render a static HTML report."""

__version__ = "0.1.0"
