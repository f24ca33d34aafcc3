"""Application entry point for the peakrank backend."""

from peakrank.main import run

if __name__ == "__main__":
    run()
