"""External services used by the job posting wizard."""
