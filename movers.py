"""Лидеры роста и падения NSE: сравнение с прошлым запуском и вывод таблиц."""
import argparse
import asyncio
import logging
import os
import sys
import time
from pathlib import Path

import yaml
from rich.console import Console

from delta import compute_delta
from extractor import extract_records
from fetcher import TIMEOUT, USER_AGENT, fetch_html
from reporter import render
from reports import REPORT_MAP
from snapshot_store import load_snapshot, save_snapshot

log = logging.getLogger(__name__)

DEFAULTS = {
    "data_dir": ".",
    "reports": ["gainers", "losers"],
    "timeout": TIMEOUT,
    "interval": 0,          # 0: один проход
    "user_agent": USER_AGENT,
}


def load_cfg(path: str = "config.yaml") -> dict:
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}
    return {**DEFAULTS, **data}


async def run_report(
    path: Path,
    url: str,
    is_gainer: bool,
    title: str | None = None,
    timeout: float = TIMEOUT,
    user_agent: str = USER_AGENT,
    console: Console | None = None,
) -> list[dict] | None:
    """Один отчёт: снимок → загрузка → разбор → дельта → запись → таблица.

    Любая ошибка логируется и завершает только этот отчёт.
    """
    if title is None:
        title = "Gainers Information" if is_gainer else "Losers Information"
    try:
        prior = load_snapshot(path)

        html = await asyncio.to_thread(
            fetch_html, url, timeout, {"User-Agent": user_agent}
        )
        records = extract_records(html)
        for rec in records:
            compute_delta(prior, rec)
        log.debug("%s: %d rows from %s", title, len(records), url)

        save_snapshot(path, records)
        render(title, is_gainer, records, console)
        return records
    except Exception:
        log.exception("%s failed", title)
        return None


async def run_all(cfg: dict, console: Console | None = None) -> list:
    data_dir = Path(cfg["data_dir"])
    tasks = []
    for name in cfg["reports"]:
        report = REPORT_MAP[name]
        tasks.append(
            run_report(
                data_dir / report.FILENAME,
                report.URL,
                report.IS_GAINER,
                title=report.TITLE,
                timeout=cfg["timeout"],
                user_agent=cfg["user_agent"],
                console=console,
            )
        )
    return await asyncio.gather(*tasks, return_exceptions=True)


def main() -> None:
    cli = argparse.ArgumentParser(description="лидеры роста/падения NSE с дельтой с прошлого запуска")
    cli.add_argument("--config", default="config.yaml", help="путь к YAML-конфигу")
    cli.add_argument("--report", action="append", choices=REPORT_MAP.keys(),
                     dest="reports", help="какой отчёт строить (можно несколько раз)")
    cli.add_argument("--data-dir", help="каталог для gainers.json / losers.json")
    cli.add_argument("--timeout", type=float, help="таймаут HTTP-запроса, сек")
    cli.add_argument("--interval", type=int, help="повторять каждые N секунд")
    cli.add_argument("-v", "--verbose", action="store_true", help="debug-лог")
    args = cli.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_cfg(args.config)
    for k in ("reports", "data_dir", "timeout", "interval"):
        v = getattr(args, k)
        if v is not None:
            cfg[k] = v

    unknown = [r for r in cfg["reports"] if r not in REPORT_MAP]
    if unknown:
        cli.error(f"unknown report(s) in config: {', '.join(unknown)}")

    if not cfg["interval"]:
        asyncio.run(run_all(cfg))
        return

    log.info("repeating every %ss", cfg["interval"])
    try:
        while True:
            asyncio.run(run_all(cfg))
            time.sleep(cfg["interval"])
    except KeyboardInterrupt:
        print("\nОстановлено пользователем.")


if __name__ == "__main__":
    main()
