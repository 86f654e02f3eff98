class SimulatorError(Exception):
    """Base for every condition that ends up as the single message shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ThresholdLoadError(SimulatorError):
    pass


class SourceNotFound(ThresholdLoadError):
    def __init__(self, path: str):
        super().__init__(
            f"Error: File data cutoff ('{path}') tidak ditemukan. "
            "Pastikan file skor.json tersedia."
        )
        self.path = path


class ReadFailure(ThresholdLoadError):
    def __init__(self, path: str, reason: str = ""):
        msg = "Error: Gagal membaca isi file JSON atau file kosong."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path


class ParseFailure(ThresholdLoadError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Error saat mengurai JSON: {reason}")
        self.path = path


class IncompleteInput(SimulatorError, ValueError):
    def __init__(self, required: int):
        super().__init__(
            f"Error: Mohon isi semua {required} kolom skor dengan angka antara 0-1000."
        )
        self.required = required


# EmptyThresholdData is a warning: the average is still returned
EMPTY_THRESHOLD_DATA = (
    "Peringatan: Data skor minimum kosong atau tidak ada skor yang valid dalam file data."
)
