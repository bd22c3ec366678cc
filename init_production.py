#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
正式環境初始化腳本
"""
import os
import sys


def init_production():
    """初始化正式環境"""
    print("=== 初始化正式環境 ===")

    os.environ['FLASK_ENV'] = 'production'

    # 檢查必要的環境變數
    required_vars = ['SECRET_KEY', 'DATABASE_URL']
    missing_vars = [var for var in required_vars if not os.environ.get(var)]

    if missing_vars:
        print("缺少必要的環境變數:")
        for var in missing_vars:
            print(f"   - {var}")
        print("\n請設定以下環境變數:")
        print("export SECRET_KEY='your-secret-key'")
        print("export DATABASE_URL='sqlite:///instance/production.db'")
        return False

    from postboard import create_app, create_tables

    app = create_app()
    print(f"數據庫: {app.config['SQLALCHEMY_DATABASE_URI']}")

    try:
        create_tables(app)
    except Exception as e:
        print(f"初始化失敗: {e}")
        return False

    print("數據庫表已創建/更新")
    print("現在可以啟動應用: gunicorn -w 4 wsgi:app")
    return True


if __name__ == '__main__':
    sys.exit(0 if init_production() else 1)
