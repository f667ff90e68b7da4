# automatically generated by the FlatBuffers compiler, do not modify

# namespace: route

import flatbuffers
from flatbuffers.compat import import_numpy
np = import_numpy()

class GeoPoint(object):
    __slots__ = ['_tab']

    @classmethod
    def SizeOf(cls):
        return 8

    # GeoPoint
    def Init(self, buf, pos):
        self._tab = flatbuffers.table.Table(buf, pos)

    # GeoPoint
    def Lat(self): return self._tab.Get(flatbuffers.number_types.Int32Flags, self._tab.Pos + flatbuffers.number_types.UOffsetTFlags.py_type(0))
    # GeoPoint
    def Lon(self): return self._tab.Get(flatbuffers.number_types.Int32Flags, self._tab.Pos + flatbuffers.number_types.UOffsetTFlags.py_type(4))

def CreateGeoPoint(builder, lat, lon):
    builder.Prep(4, 8)
    builder.PrependInt32(lon)
    builder.PrependInt32(lat)
    return builder.Offset()
