#!/usr/bin/env python3
"""
MedFlow — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --delay-scale 0
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='MedFlow API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--delay-scale', type=float, default=None,
                        help='Множник штучних затримок (0 = миттєво)')

    args = parser.parse_args()

    # Сесії живуть у пам'яті процесу, тому лише один worker
    if args.delay_scale is not None:
        os.environ["MEDFLOW_DELAY_SCALE"] = str(args.delay_scale)

    print("=" * 60)
    print("🏥 MedFlow — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "medflow.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
