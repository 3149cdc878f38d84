from slink.models.short_link_record import ShortLinkRecord


__all__ = ['ShortLinkRecord']
