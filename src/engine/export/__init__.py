"""
どこで: `engine.export` サブパッケージ。
何を: 描画結果（`ProjectedFace` 列）をファイル形式へ書き出す。
なぜ: 描画コアをキャンバス/DOM に依存させずに、結果を目視・保存できるようにするため。
"""
