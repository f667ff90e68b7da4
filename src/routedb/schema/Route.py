# automatically generated by the FlatBuffers compiler, do not modify

# namespace: route

import flatbuffers
from flatbuffers.compat import import_numpy
np = import_numpy()

class Route(object):
    __slots__ = ['_tab']

    @classmethod
    def GetRootAs(cls, buf, offset=0):
        n = flatbuffers.encode.Get(flatbuffers.packer.uoffset, buf, offset)
        x = Route()
        x.Init(buf, n + offset)
        return x

    @classmethod
    def GetRootAsRoute(cls, buf, offset=0):
        """This method is deprecated. Please switch to GetRootAs."""
        return cls.GetRootAs(buf, offset)
    # Route
    def Init(self, buf, pos):
        self._tab = flatbuffers.table.Table(buf, pos)

    # Route
    def Country(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(4))
        if o != 0:
            return self._tab.String(o + self._tab.Pos)
        return None

    # Route
    def City(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(6))
        if o != 0:
            return self._tab.String(o + self._tab.Pos)
        return None

    # Route
    def Name(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(8))
        if o != 0:
            return self._tab.String(o + self._tab.Pos)
        return None

    # Route
    def Path(self, j):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(10))
        if o != 0:
            x = self._tab.Vector(o)
            x += flatbuffers.number_types.UOffsetTFlags.py_type(j) * 8
            from .GeoPoint import GeoPoint
            obj = GeoPoint()
            obj.Init(self._tab.Bytes, x)
            return obj
        return None

    # Route
    def PathLength(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(10))
        if o != 0:
            return self._tab.VectorLen(o)
        return 0

    # Route
    def PathIsNone(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(10))
        return o == 0

def RouteStart(builder):
    builder.StartObject(4)

def Start(builder):
    RouteStart(builder)

def RouteAddCountry(builder, country):
    builder.PrependUOffsetTRelativeSlot(0, flatbuffers.number_types.UOffsetTFlags.py_type(country), 0)

def AddCountry(builder, country):
    RouteAddCountry(builder, country)

def RouteAddCity(builder, city):
    builder.PrependUOffsetTRelativeSlot(1, flatbuffers.number_types.UOffsetTFlags.py_type(city), 0)

def AddCity(builder, city):
    RouteAddCity(builder, city)

def RouteAddName(builder, name):
    builder.PrependUOffsetTRelativeSlot(2, flatbuffers.number_types.UOffsetTFlags.py_type(name), 0)

def AddName(builder, name):
    RouteAddName(builder, name)

def RouteAddPath(builder, path):
    builder.PrependUOffsetTRelativeSlot(3, flatbuffers.number_types.UOffsetTFlags.py_type(path), 0)

def AddPath(builder, path):
    RouteAddPath(builder, path)

def RouteStartPathVector(builder, numElems):
    return builder.StartVector(8, numElems, 4)

def StartPathVector(builder, numElems):
    return RouteStartPathVector(builder, numElems)

def RouteEnd(builder):
    return builder.EndObject()

def End(builder):
    return RouteEnd(builder)
