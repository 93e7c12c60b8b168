"""Lays a generated bundle out as a project tree."""
from pathlib import Path
from typing import List

from app.generators.app_gen.types import GeneratedArtifactBundle, GeneratedFile


def bundle_to_files(bundle: GeneratedArtifactBundle) -> List[GeneratedFile]:
    """Map bundle entries to paths inside a Vite + Supabase project."""
    files = []
    for name, content in bundle.code.components.items():
        files.append(GeneratedFile(path=f"src/components/{name}", content=content))
    for name, content in bundle.code.hooks.items():
        files.append(GeneratedFile(path=f"src/hooks/{name}", content=content))
    for name, content in bundle.code.utils.items():
        files.append(GeneratedFile(path=f"src/lib/{name}", content=content))
    files.append(GeneratedFile(path="src/types/index.ts", content=bundle.code.types))
    files.append(GeneratedFile(path="src/config/app.config.ts", content=bundle.code.config))

    if bundle.backend.schema:
        files.append(GeneratedFile(path="supabase/schema.sql", content=bundle.backend.schema))
    for name, content in bundle.backend.edge_functions.items():
        files.append(GeneratedFile(path=f"supabase/functions/{name}/index.ts", content=content))

    env_lines = [f"{key}={value}" for key, value in bundle.deployment.env_vars.items()]
    files.append(GeneratedFile(path=".env.example", content="\n".join(env_lines) + "\n"))
    return files


def write_files(files: List[GeneratedFile], out_dir: Path) -> None:
    """
    Write generated files to the output directory.
    
    Args:
        files: List of GeneratedFile objects to write
        out_dir: Base output directory path
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    
    for file in files:
        file_path = out_dir / file.path
        # Create parent directories if needed
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")


def write_bundle(bundle: GeneratedArtifactBundle, out_dir: Path) -> List[GeneratedFile]:
    files = bundle_to_files(bundle)
    write_files(files, out_dir)
    return files
