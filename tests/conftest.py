import os

# Qtのウィジェットテストをディスプレイなしで実行する
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
