# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: cloudops/core/protos/wordpress_ops.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n(cloudops/core/protos/wordpress_ops.proto\x12\x08\x63loudlab\"_\n\x10\x44\x65ployAppRequest\x12\x13\n\x0b\x63redentials\x18\x01 \x01(\t\x12\x12\n\nbucketName\x18\x02 \x01(\t\x12\x10\n\x08username\x18\x03 \x01(\t\x12\x10\n\x08publicIP\x18\x04 \x01(\t\" \n\x0e\x44\x65ployAppReply\x12\x0e\n\x06output\x18\x01 \x01(\t\"^\n\x0f\x44\x65ployDBRequest\x12\x13\n\x0b\x63redentials\x18\x01 \x01(\t\x12\x12\n\nbucketName\x18\x02 \x01(\t\x12\x10\n\x08username\x18\x03 \x01(\t\x12\x10\n\x08publicIP\x18\x04 \x01(\t\"\x1f\n\rDeployDBReply\x12\x0e\n\x06output\x18\x01 \x01(\t\"]\n\x0e\x43onnectRequest\x12\x13\n\x0b\x63redentials\x18\x01 \x01(\t\x12\x12\n\nbucketName\x18\x02 \x01(\t\x12\x10\n\x08username\x18\x03 \x01(\t\x12\x10\n\x08publicIP\x18\x04 \x01(\t\"\x1e\n\x0c\x43onnectReply\x12\x0e\n\x06output\x18\x01 \x01(\t2\xdb\x01\n\x0cWordPressOps\x12\x43\n\tdeployApp\x12\x1a.cloudlab.DeployAppRequest\x1a\x18.cloudlab.DeployAppReply\"\x00\x12@\n\x08\x64\x65ployDB\x12\x19.cloudlab.DeployDBRequest\x1a\x17.cloudlab.DeployDBReply\"\x00\x12\x44\n\x0e\x63onnectAppToDB\x12\x18.cloudlab.ConnectRequest\x1a\x16.cloudlab.ConnectReply\"\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'cloudops.core.protos.wordpress_ops_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _DEPLOYAPPREQUEST._serialized_start=54
  _DEPLOYAPPREQUEST._serialized_end=149
  _DEPLOYAPPREPLY._serialized_start=151
  _DEPLOYAPPREPLY._serialized_end=183
  _DEPLOYDBREQUEST._serialized_start=185
  _DEPLOYDBREQUEST._serialized_end=279
  _DEPLOYDBREPLY._serialized_start=281
  _DEPLOYDBREPLY._serialized_end=312
  _CONNECTREQUEST._serialized_start=314
  _CONNECTREQUEST._serialized_end=407
  _CONNECTREPLY._serialized_start=409
  _CONNECTREPLY._serialized_end=439
  _WORDPRESSOPS._serialized_start=442
  _WORDPRESSOPS._serialized_end=661
# @@protoc_insertion_point(module_scope)
