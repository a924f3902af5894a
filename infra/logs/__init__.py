from .filesystem_run_artifact_store import FileSystemRunArtifactStore

__all__ = ["FileSystemRunArtifactStore"]
