"""
どこで: `engine.core` サブパッケージ。
何を: ベクトル演算（vecmath）・面メッシュ（Mesh）・変換ユーティリティを提供。
なぜ: 生成と描画の間の幾何計算を構成し、上位層（shapes/render）から再利用可能にするため。
"""
