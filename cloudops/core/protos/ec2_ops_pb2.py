# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: cloudops/core/protos/ec2_ops.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\"cloudops/core/protos/ec2_ops.proto\x12\x08\x63loudlab\"_\n\x07Request\x12\x0e\n\x06region\x18\x01 \x01(\t\x12\n\n\x02OS\x18\x02 \x01(\t\x12\x13\n\x0bmachineSize\x18\x03 \x01(\t\x12\x0f\n\x07keyPair\x18\x04 \x01(\t\x12\x12\n\nbucketName\x18\x05 \x01(\t\"-\n\x05Reply\x12\x12\n\ninstanceID\x18\x01 \x01(\t\x12\x10\n\x08publicIP\x18\x02 \x01(\t\"4\n\x0e\x44\x65stroyRequest\x12\x12\n\ninstanceID\x18\x01 \x01(\t\x12\x0e\n\x06region\x18\x02 \x01(\t\"\x1e\n\x0c\x44\x65stroyReply\x12\x0e\n\x06status\x18\x01 \x01(\t2{\n\x06\x45\x43\x32Ops\x12\x30\n\x08\x63reateVM\x12\x11.cloudlab.Request\x1a\x0f.cloudlab.Reply\"\x00\x12?\n\tdestroyVM\x12\x18.cloudlab.DestroyRequest\x1a\x16.cloudlab.DestroyReply\"\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'cloudops.core.protos.ec2_ops_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _REQUEST._serialized_start=48
  _REQUEST._serialized_end=143
  _REPLY._serialized_start=145
  _REPLY._serialized_end=190
  _DESTROYREQUEST._serialized_start=192
  _DESTROYREQUEST._serialized_end=244
  _DESTROYREPLY._serialized_start=246
  _DESTROYREPLY._serialized_end=276
  _EC2OPS._serialized_start=278
  _EC2OPS._serialized_end=401
# @@protoc_insertion_point(module_scope)
