from blog_api.utils.helpers import get_summary, host, today_str, utc_now

__all__ = ["get_summary", "host", "today_str", "utc_now"]
