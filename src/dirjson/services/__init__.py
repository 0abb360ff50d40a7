"""Service layer — the File Coordinator and the self-coding mixin."""
