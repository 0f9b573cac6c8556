from translatable.adapter.enums.base import BaseAdapterActionEnum


class AdapterAction(BaseAdapterActionEnum):
    FIND = "find"
    LOAD = "load"
    INSERT = "insert"
    PURGE = "purge"
    READ_VALUE = "read_value"
    WRITE_VALUE = "write_value"
