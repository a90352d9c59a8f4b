#!/usr/bin/env python3
"""
Lista (e opcionalmente remove) arquivos em uploads/ que nenhum registro referencia.

Arquivos orfaos surgem quando o processo cai entre salvar o upload e
persistir a colecao.

Uso:
  python scripts/prune_uploads.py [--delete]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import Settings, get_settings  # noqa: E402
from api.repositories.json_storage import load_collection  # noqa: E402
from api.repositories.upload_storage import UploadStorage  # noqa: E402


def referenced_urls(settings: Settings) -> Iterator[str]:
    for project in load_collection(settings.projects_path):
        yield from project.get("imageUrls") or []
    for image in load_collection(settings.carousel_path):
        if image.get("url"):
            yield image["url"]


def main() -> None:
    ap = argparse.ArgumentParser(description="Find uploads not referenced by any project or carousel image")
    ap.add_argument("--delete", action="store_true", help="Remove the orphaned files instead of only listing them")
    args = ap.parse_args()

    settings = get_settings()
    uploads = UploadStorage(settings.uploads_dir, settings.public_base_url)
    orphans = uploads.orphans(referenced_urls(settings))
    if not orphans:
        print("Nenhum arquivo orfao encontrado.")
        return

    for name in orphans:
        print(f"  {name}")
    if args.delete:
        uploads.discard(orphans)
        print(f"OK: {len(orphans)} arquivo(s) removido(s)")
    else:
        print(f"{len(orphans)} arquivo(s) orfao(s); use --delete para remover.")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
