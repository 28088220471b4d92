"""isp_ledger: tariffs, clients, traffic and billing for an ISP back office."""


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from isp_ledger.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
