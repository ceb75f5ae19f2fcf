"""Qt host shell: main window, settings form and host adapters."""
