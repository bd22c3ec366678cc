#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
postboard Application Launcher

統一的應用程式啟動器，支持開發環境與配置檢查。

Usage:
    開發環境:
        python app_launcher.py
        或 python app_launcher.py --dev

    生產環境 (WSGI):
        gunicorn -w 4 wsgi:app

    檢查配置:
        python app_launcher.py --check-config

Environment Variables:
    - FLASK_ENV: 'development' or 'production' (default: development)
    - FLASK_HOST: Host for development server (default: 127.0.0.1)
    - FLASK_PORT: Port number for development server (default: 8080)
    - ENV_PATH: Path to .env file (default: .env)
"""
import os
import sys
import logging
import argparse
from pathlib import Path
from dotenv import load_dotenv

from postboard import create_app
from config import get_config, DevelopmentConfig


def load_environment():
    """載入環境變數"""
    env_path = os.environ.get('ENV_PATH', '.env')
    possible_env_paths = [
        env_path,
        '.env',
        os.path.join(os.path.dirname(__file__), '.env'),
    ]

    for path in possible_env_paths:
        if Path(path).exists() and load_dotenv(path):
            print(f"Environment loaded from: {path}")
            return True

    print("Warning: .env file not found. Using system environment variables.")
    return False


def setup_logging():
    """設置基本日誌"""
    log_level = logging.INFO if os.environ.get('FLASK_ENV') == 'production' else logging.DEBUG
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def check_config():
    """檢查配置是否正確"""
    print("Checking application configuration...")

    try:
        env = os.environ.get('FLASK_ENV', 'development')
        config_class = get_config(env)

        print(f"Environment: {env}")
        print(f"Config class: {config_class.__name__}")

        app = create_app(config_class=config_class)

        with app.app_context():
            print("App created successfully")
            print(f"Debug mode: {app.config.get('DEBUG')}")
            print(f"Database URI: {app.config.get('SQLALCHEMY_DATABASE_URI')}")
            print(f"Secret key configured: {'Yes' if app.config.get('SECRET_KEY') else 'No'}")

        print("Configuration check passed!")
        return True

    except Exception as e:
        print(f"Configuration check failed: {e}")
        return False


def run_development_server():
    """運行開發伺服器"""
    load_environment()
    setup_logging()

    app = create_app(config_class=DevelopmentConfig)

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 8080))

    print(f"Starting development server on http://{host}:{port}")
    app.run(host=host, port=port, debug=True, threaded=True)


def main(argv=None):
    """主函數，處理命令行參數"""
    parser = argparse.ArgumentParser(description='postboard Application Launcher')
    parser.add_argument('--dev', action='store_true', help='Force development mode')
    parser.add_argument('--check-config', action='store_true', help='Check configuration and exit')

    args = parser.parse_args(argv)

    if args.check_config:
        success = check_config()
        sys.exit(0 if success else 1)

    if args.dev:
        os.environ['FLASK_ENV'] = 'development'

    env = os.environ.get('FLASK_ENV', 'development')

    if env == 'development':
        run_development_server()
    else:
        print("Production mode detected. Use a WSGI server instead:")
        print("  gunicorn -w 4 wsgi:app")
        sys.exit(1)


if __name__ == '__main__':
    main()
