"""Generation-run orchestration and the file-writing collaborator."""
