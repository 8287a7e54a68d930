"""
どこで: `demos` パッケージ。
何を: 数値カーネルの利用例（投射体・時計）と、それを PPM に書き出す CLI（`python -m demos`）。
なぜ: ループ/終了条件などの駆動方針をコアの外に置き、コアを純粋な部品に保つため。
"""
