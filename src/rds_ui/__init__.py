"""adms-rds-ui: copy ADMS RDS UI components into a consumer project.

Import from submodules:
- version: __version__
- cli.cli: cli, main
"""

from rds_ui.version import __version__ as __version__
