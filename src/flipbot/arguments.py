class Arguments:
    def __init__(self, think_delay_ms: int, verbose: bool) -> None:
        self.think_delay_ms = think_delay_ms
        self.verbose = verbose
