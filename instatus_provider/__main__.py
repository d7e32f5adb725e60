"""
Pulumi program entry point for Instatus status page components.

See instatus_provider.program for what gets declared.
"""

from instatus_provider.program import main

# Execute
main()
