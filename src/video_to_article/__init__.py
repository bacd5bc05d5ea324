"""Video to Article - turn a local video into a blog article bundle.

Usage:
  video-to-article convert ./videos/talk.mp4 [./output]

  from video_to_article.pipeline import process_video
"""

__version__ = "0.1.0"
