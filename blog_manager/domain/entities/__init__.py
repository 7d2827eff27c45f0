from blog_manager.domain.entities.post import Post, PostPatch, utcnow

__all__ = ["Post", "PostPatch", "utcnow"]
