# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: cloudops/core/protos/generic_ops.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n&cloudops/core/protos/generic_ops.proto\x12\x08\x63loudlab\"\x86\x01\n\x0eGenericRequest\x12\x13\n\x0b\x63redentials\x18\x01 \x01(\t\x12\x12\n\nbucketName\x18\x02 \x01(\t\x12\x10\n\x08username\x18\x03 \x01(\t\x12\x10\n\x08publicIP\x18\x04 \x01(\t\x12\x12\n\nmoduleName\x18\x05 \x01(\t\x12\x13\n\x0binstallFile\x18\x06 \x01(\t\"\x1e\n\x0cGenericReply\x12\x0e\n\x06output\x18\x01 \x01(\t2J\n\nGenericOps\x12<\n\x06\x63reate\x12\x18.cloudlab.GenericRequest\x1a\x16.cloudlab.GenericReply\"\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'cloudops.core.protos.generic_ops_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _GENERICREQUEST._serialized_start=53
  _GENERICREQUEST._serialized_end=187
  _GENERICREPLY._serialized_start=189
  _GENERICREPLY._serialized_end=219
  _GENERICOPS._serialized_start=221
  _GENERICOPS._serialized_end=295
# @@protoc_insertion_point(module_scope)
